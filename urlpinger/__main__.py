from urlpinger.main import main

main()
