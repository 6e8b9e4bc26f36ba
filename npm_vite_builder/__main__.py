from npm_vite_builder.main import run

run()
