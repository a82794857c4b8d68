from letterinventory import main

main()
