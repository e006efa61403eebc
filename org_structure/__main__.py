from org_structure.main import run

run()
