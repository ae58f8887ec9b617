from asadesuka.cli import run

run()
