import sys
import requests

from argparse import ArgumentParser

parser = ArgumentParser(description="Talk to an avl-db server")
parser.add_argument("--server", default="localhost:5000")
commands = parser.add_subparsers(dest="command", required=True)

set_command = commands.add_parser("set")
set_command.add_argument("key")
set_command.add_argument("value")

for name in ["get", "delete"]:
    commands.add_parser(name).add_argument("key")

for name in ["min", "max", "height", "balanced", "size", "dump"]:
    commands.add_parser(name)

traverse_command = commands.add_parser("traverse")
traverse_command.add_argument("order", choices=["preorder", "inorder", "postorder", "breadth_first"])

between_command = commands.add_parser("between")
between_command.add_argument("start")
between_command.add_argument("stop")


def request_for(args):
    base = "http://{}".format(args.server)
    if args.command == "set":
        return "post", "{}/set/{}".format(base, args.key), args.value.encode('utf-8')
    if args.command == "get":
        return "get", "{}/get/{}".format(base, args.key), None
    if args.command == "delete":
        return "post", "{}/delete/{}".format(base, args.key), None
    if args.command == "traverse":
        return "get", "{}/traverse/{}".format(base, args.order), None
    if args.command == "between":
        return "get", "{}/between/{}/{}".format(base, args.start, args.stop), None
    return "get", "{}/{}".format(base, args.command), None


def main(argv=None):
    args = parser.parse_args(argv)
    method, url, data = request_for(args)
    if method == "post":
        response = requests.post(url, data=data)
    else:
        response = requests.get(url)
    print(response.text)
    if response.status_code >= 400:
        print("{} returned {}".format(url, response.status_code), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
