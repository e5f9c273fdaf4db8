# This file marks the services package for API business logic modules.
# Service modules hold the quote, directory, and contact logic behind the routers.
