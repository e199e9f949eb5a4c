from nvmg.cli import main

main()
