from fastpy.cli import main

main()
