"""
services/ - Business Logic Layer
================================
Services compose repositories; they never issue SQL directly.
"""
