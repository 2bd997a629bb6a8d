from event_organizer.cli import main

main()
