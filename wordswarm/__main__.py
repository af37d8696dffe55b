from wordswarm.main import main

main()
