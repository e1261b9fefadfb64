from cppsage.cli import main

main()
