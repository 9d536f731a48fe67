from timecalc.cli import main

main()
