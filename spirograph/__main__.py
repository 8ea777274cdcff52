from spirograph.app import main

main()
