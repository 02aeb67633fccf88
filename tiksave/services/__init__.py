"""TikSave - Services Package."""
