from stayvista.main import run

run()
