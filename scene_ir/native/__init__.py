"""Native scene model and the asset parser interface it is produced by."""
