from apicompare.cli.app import main

main()
