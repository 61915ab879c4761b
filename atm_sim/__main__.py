from atm_sim.cli import run

run()
