"""Platform services: logging, filesystem and child-process helpers."""
