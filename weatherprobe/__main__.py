from weatherprobe.main import run

run()
