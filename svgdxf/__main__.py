from svgdxf.cli import run

run()
