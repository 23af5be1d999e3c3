"""
Persistence layer: ORM rows, the datasource, mappers and repositories.
"""
