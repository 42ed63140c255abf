from donation_api.server import main

main()
