from relsign.cli.app import main

main()
