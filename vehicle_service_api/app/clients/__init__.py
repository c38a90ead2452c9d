"""Clients for services this API depends on."""
