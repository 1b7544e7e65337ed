"""Two-player chess played in the terminal."""