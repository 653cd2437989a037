from typedstore.cli import main

main()
