# tests/test_cli.py
import cli

class FakeClient:
    def __init__(self):
        self.calls = []

    def __getattr__(self, name):
        def record(*args, **kwargs):
            self.calls.append((name, args, kwargs))
            return {"called": name}
        return record

def run(argv):
    client = FakeClient()
    result = cli.run_command(cli.build_parser().parse_args(argv), client)
    return result, client.calls

def test_list_and_get():
    assert run(["list"])[1] == [("list_products", (), {})]
    assert run(["get", "--id", "3"])[1] == [("get_product", (3,), {})]

def test_create_defaults_in_stock_to_server():
    _, calls = run(["create", "--name", "Pen", "--price", "2.5", "--description", "Blue", "--category", "office"])
    assert calls == [("create_product", ("Pen", 2.5, "Blue", "office", None), {})]

    _, calls = run(["create", "--name", "Pen", "--price", "2", "--description", "Blue",
                    "--category", "office", "--out-of-stock"])
    assert calls[0][1][-1] is False

def test_update_sends_only_given_fields():
    _, calls = run(["update", "--id", "2", "--price", "9.5", "--out-of-stock"])
    assert calls == [("update_product", (2,), {"price": 9.5, "inStock": False})]

    _, calls = run(["update", "--id", "2", "--name", "Marker"])
    assert calls == [("update_product", (2,), {"name": "Marker"})]

def test_delete():
    result, calls = run(["delete", "--id", "7"])
    assert result == {"called": "delete_product"}
    assert calls == [("delete_product", (7,), {})]
