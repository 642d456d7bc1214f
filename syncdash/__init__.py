"""syncdash: session, gateway, and tab-strip core for the media-sync dashboard."""

__version__ = "0.1.0"
