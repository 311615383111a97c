"""Section Controller - timetable and signalling simulation for a single rail section."""
