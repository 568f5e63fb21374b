"""
neurondeck.

Deck recipe scraper for the Yu-Gi-Oh! OCG card database.
"""
