from order_locator.main import run

run()
