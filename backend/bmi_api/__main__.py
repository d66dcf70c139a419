from bmi_api.main import run

run()
