"""Sample command modules mounted by the registry/dispatcher tests via include()."""
