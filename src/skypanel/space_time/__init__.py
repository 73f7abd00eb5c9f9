"""Calendar, angle and sidereal-time helpers."""
