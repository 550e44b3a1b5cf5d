from routeoptimize.app.main import main

main()
