from termtodo.cli.main import main

main()
