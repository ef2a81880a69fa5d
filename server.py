import os
import json
from argparse import ArgumentParser
from threading import Lock
from flask import Flask, request, make_response
from avltree import AVLTree

parser = ArgumentParser()
parser.add_argument("--key-type", choices=["str", "int"], default="str")
args = parser.parse_args(os.environ.get("AVLDB_ARGS", "").split())

key_types = {
    "str": str,
    "int": int
}

app = Flask(__name__)
app.config["KEY_TYPE"] = args.key_type

tree = AVLTree()
lock = Lock()


def parse_key(raw):
    convert = key_types[app.config["KEY_TYPE"]]
    try:
        return convert(raw)
    except ValueError:
        return None

def bad_key(raw):
    return make_response(json.dumps({"error": "bad key {}".format(raw)}), 400)

def asnode(node):
    return json.dumps({"key": node.key, "value": node.value})

def aspairs(items):
    return json.dumps([[key, value] for key, value in items])


@app.route("/set/<key>", methods=["POST"])
def set_value(key):
    parsed = parse_key(key)
    if parsed is None:
        return bad_key(key)
    try:
        value = request.data.decode('utf-8')
    except UnicodeDecodeError:
        return make_response(json.dumps({"error": "value for {} is not utf-8".format(parsed)}), 400)
    print("Saving {} to {}".format(value, parsed))
    with lock:
        tree.insert(parsed, value)
    return make_response(json.dumps({"key": parsed, "value": value}), 202)

@app.route("/get/<key>", methods=["GET", "POST"])
def get(key):
    parsed = parse_key(key)
    if parsed is None:
        return bad_key(key)
    missing = object()
    with lock:
        value = tree.get(parsed, missing)
    if value is missing:
        return make_response(json.dumps({"error": "no key {}".format(parsed)}), 404)
    return make_response(json.dumps({"key": parsed, "value": value}))

@app.route("/delete/<key>", methods=["POST"])
def delete(key):
    parsed = parse_key(key)
    if parsed is None:
        return bad_key(key)
    with lock:
        if parsed not in tree:
            return make_response(json.dumps({"error": "no key {}".format(parsed)}), 404)
        tree.delete(parsed)
    print("Deleted {}".format(parsed))
    return make_response(json.dumps({"key": parsed}), 202)

@app.route("/min", methods=["GET"])
def find_min():
    with lock:
        node = tree.find_min()
        if node is None:
            return make_response(json.dumps({"error": "empty"}), 404)
        return make_response(asnode(node))

@app.route("/max", methods=["GET"])
def find_max():
    with lock:
        node = tree.find_max()
        if node is None:
            return make_response(json.dumps({"error": "empty"}), 404)
        return make_response(asnode(node))

@app.route("/height", methods=["GET"])
def height():
    with lock:
        return make_response(json.dumps({"height": tree.height}))

@app.route("/balanced", methods=["GET"])
def balanced():
    with lock:
        return make_response(json.dumps({"balanced": tree.is_balanced()}))

@app.route("/size", methods=["GET"])
def size():
    with lock:
        return make_response(json.dumps({"size": len(tree)}))

@app.route("/traverse/<order>", methods=["GET"])
def traverse(order):
    with lock:
        try:
            items = list(tree.traverse(order))
        except ValueError as e:
            return make_response(json.dumps({"error": str(e)}), 400)
    return make_response(aspairs(items))

@app.route("/between/<start>/<stop>", methods=["GET"])
def between(start, stop):
    parsed_start, parsed_stop = parse_key(start), parse_key(stop)
    if parsed_start is None:
        return bad_key(start)
    if parsed_stop is None:
        return bad_key(stop)
    with lock:
        items = list(tree.walk(parsed_start, parsed_stop))
    return make_response(aspairs(items))

@app.route("/ping", methods=["POST"])
def ping():
    with lock:
        return make_response(str(len(tree)))

@app.route("/dump")
def dump():
    with lock:
        return make_response(aspairs(tree.inorder()))
