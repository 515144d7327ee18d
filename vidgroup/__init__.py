"""
Vidgroup - Video batch grouping tool.

Groups a hand-picked selection of video files by:
- Scanning a directory tree for video files
- Extracting a preview frame of each video with ffmpeg
- Moving the selected videos into a folder named after the first one
"""

__version__ = "0.1.0"
