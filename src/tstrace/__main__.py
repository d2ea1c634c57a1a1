from tstrace.cli import main

main()
