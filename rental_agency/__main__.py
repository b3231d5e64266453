from rental_agency.cli import main

main()
