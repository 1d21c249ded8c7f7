from airport_dataset.cli import main

main()
