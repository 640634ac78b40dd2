"""SOLID playground: a geo-political nation model and a keyed persistence store."""
