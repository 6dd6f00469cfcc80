"""
Bookstore Service
"""
