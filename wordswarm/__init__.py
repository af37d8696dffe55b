"""Word Swarm: typed letters drift, cluster and resolve into words."""

__version__ = "0.1.0"
