from baseline.cli.app import main

main()
