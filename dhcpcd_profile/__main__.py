from dhcpcd_profile.cli import main

main()
