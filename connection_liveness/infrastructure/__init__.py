"""Infrastructure layer: monitor, scheduling, platform observers and relay."""
