"""Core logic for app-icon-updater: the icon manifest, configuration and render pipeline."""
