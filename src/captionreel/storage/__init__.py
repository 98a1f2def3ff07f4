"""Durable storage for render inputs."""
