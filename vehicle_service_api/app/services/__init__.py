"""
Service layer.

``stores`` declares the two collaborator contracts the enrichment
logic depends on, ``vehicle_service`` implements the vehicle store on
SQLite, ``memory`` provides in-memory stand-ins for both contracts and
``enrichment_service`` joins vehicles with their owners.
"""
