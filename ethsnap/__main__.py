from ethsnap.server.cli import main

main()
