from subclip.cli import main

main()
