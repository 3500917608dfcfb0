from setuptools import setup

setup(
    name="arcgis-rest-types",
    version="0.4.0",
    description="Typed msgspec schemas for ArcGIS REST JSON: geometries, features, symbols and web maps",
    license="Apache-2.0",
    packages=["arcgis_rest_types"],
    package_data={"arcgis_rest_types": ["py.typed"]},
    python_requires=">=3.9",
    install_requires=["msgspec>=0.18.0"],
    extras_require={"test": ["pytest"]},
)
