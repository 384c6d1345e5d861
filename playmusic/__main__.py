from playmusic.main import run

run()
