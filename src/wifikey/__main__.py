from wifikey.cli import main

main()
