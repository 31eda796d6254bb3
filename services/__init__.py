"""Civic Impact Tickets services"""
