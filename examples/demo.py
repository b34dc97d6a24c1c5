"""
jsonaccess demonstration script.
"""

import jsonaccess as ja


def main():
    print("jsonaccess - JSON Values and Safe Accessors Demo")
    print("=" * 40)

    doc = ja.parse(
        """
        {
            "server": {"host": "localhost", "port": 8080, "ssl": false},
            "features": ["auth", "logging", null],
            "owner": null
        }
        """
    )

    server = ja.js_get("server", doc)
    print(f"host:     {ja.js_str(lambda v: '?', ja.js_get('host', server))}")
    print(f"port:     {ja.js_num(lambda v: 80, ja.js_get('port', server))}")

    ssl = ja.js_true(ja.js_get("ssl", server))
    debug = ja.js_true(ja.js_get("debug", doc))
    print(f"ssl:      {ssl} (defined: {ja.is_defined(ssl)})")
    print(f"debug:    {debug} (defined: {ja.is_defined(debug)})")

    features = [ja.js_str(lambda v: "<not a string>", f) for f in ja.js_list(ja.js_get("features", doc))]
    print(f"features: {features}")
    print(f"typo'd list is empty: {ja.js_list(ja.js_get('featuers', doc))}")
    print(f"owner present: {'owner' in ja.js_keys(doc)}, null: {ja.js_is_null(ja.js_get('owner', doc))}")

    print("\nMalformed input:")
    for text in ['{"a":}', "{} x", "[1, 2", '{"a" 1}', "{1: 2}"]:
        try:
            ja.parse(text)
        except ja.InvalidJSONError as e:
            print(f"  {text!r:12} -> {e}")

    built = ja.js_of_obj({"ok": ja.js_of_bool(True), "items": ja.js_of_list()})
    print(f"\nBuilt value as text: {ja.dumps(built)}")


if __name__ == "__main__":
    main()
