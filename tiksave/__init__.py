"""
TikSave
=======

Paste a TikTok link, preview it, save the video or its audio.

Author: حَـــــنَّـــــا
"""

__version__ = "1.0.0"
