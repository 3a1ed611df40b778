"""
Flat-file CMS: markdown and text documents behind a session sign-in.
"""
