from gsoc2_cli.cli.app import main

main()
