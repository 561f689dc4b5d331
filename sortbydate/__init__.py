"""
Sortbydate - Media library organization by capture date.

Organizes media files into YEAR/MONTH directories by:
- Reading capture dates from file metadata via exiftool
- Moving or copying files with a bounded pool of workers
- Optionally syncing results to a remote host over ssh/rsync
"""

__version__ = "0.1.0"
