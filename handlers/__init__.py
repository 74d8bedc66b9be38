"""
handlers/ - Presentation Layer
================================
Command-line handlers. Each handler receives parsed arguments,
delegates to the appropriate Service, and prints the response.
No business logic lives here.
"""
