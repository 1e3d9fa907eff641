from wordrush.cli import main

main()
