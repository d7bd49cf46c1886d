"""Small pure helpers shared by the topology and the level codec."""
