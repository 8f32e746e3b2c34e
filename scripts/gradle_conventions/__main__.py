from .conventions_pipeline import main

main()
