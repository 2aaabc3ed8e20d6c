from oaslint.main import main

main()
