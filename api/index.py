"""
Vercel serverless function entry point for Flask app
"""
import sys
import os

# Add parent directory to path to import modules
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from prakrit_verb import app

# Vercel serves the WSGI application bound to the name 'app'
