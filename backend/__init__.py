"""
Daily News Viewer backend.
"""
