"""Pixel-buffer images, XPM loading, X11 colour names and pixel conversion."""