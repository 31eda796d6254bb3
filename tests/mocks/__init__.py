"""Test doubles shared across test layers"""
