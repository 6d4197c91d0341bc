from logroute.cli import main

main()
