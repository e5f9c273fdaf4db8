# This file marks the schemas package for API response and request models.
# Grouping contracts here helps keep response typing easy to navigate.
