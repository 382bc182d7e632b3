from calc.app import run

run()
