from rmpc.cli import main

main()
