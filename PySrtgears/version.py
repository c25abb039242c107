__version__ = "1.1.0"

home_page = "https://srt-gears.appspot.com/"
author = "Andras Belicza"
