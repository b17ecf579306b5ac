from countdown.cli.main import main

main()
