"""
Database Base Module

Holds the shared SQLAlchemy instance used by the stored collection table.
Kept apart from app.py so models and storage can import it without a cycle.
"""

from flask_sqlalchemy import SQLAlchemy

# Bound to the Flask app in app.create_app via db.init_app
db = SQLAlchemy()
