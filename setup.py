from setuptools import setup

yaml_deps = ["pyyaml"]
test_deps = ["pytest", "attrs", *yaml_deps]

extras_require = {
    "yaml": yaml_deps,
    "test": test_deps,
}

setup(
    name="geojson-structs",
    version="0.1.0",
    description="Typed GeoJSON objects with fast JSON encoding and decoding, built on msgspec.",
    license="BSD",
    packages=["geojson_structs"],
    package_data={"geojson_structs": ["py.typed"]},
    python_requires=">=3.9",
    install_requires=["msgspec>=0.19"],
    extras_require=extras_require,
    zip_safe=False,
)
