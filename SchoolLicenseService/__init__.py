"""
School License Service Django project.
"""
