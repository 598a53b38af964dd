"""
Catalogue clients: real_http/ for the live API, mocks/ for local data.
"""
