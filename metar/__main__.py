from metar.main import run

run()
