from setuptools import setup, find_namespace_packages

import django_billdocs

PACKAGES = find_namespace_packages(include=["django_billdocs", "django_billdocs.*"])

setup(
    extras_require={
        "dev": ["pytest~=7.4", "pytest-django~=4.5", "pylint"]
    },
    dependency_links=[],
    name="django-billdocs",
    version=django_billdocs.__version__,
    packages=PACKAGES,
    url=django_billdocs.__url__,
    license=django_billdocs.__license__,
    keywords="django, invoice, purchase order, billing, docx, pdf, document numbering",
    description="Invoice & Purchase Order backend for Django. Date scoped document numbering, Word templates "
    + "and PDF rendering",
    include_package_data=True,
    package_data={
        "django_billdocs": ["docx_templates/*.docx"],
    },
    install_requires=[
        "django>=4.1,<5.1",
        "django-cors-headers>=3.13",
        "dj-database-url>=1.2",
        "faker>=15.3.3",
        "fpdf2>=2.7.6",
        "jsonschema>=4.17",
        "python-dateutil>=2.8.2",
        "python-docx>=1.1",
        "python-dotenv>=0.21",
    ],
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: Implementation :: CPython",
        "Topic :: Office/Business :: Financial :: Accounting",
        "Development Status :: 3 - Alpha",
        "Framework :: Django :: 4.1",
        "Intended Audience :: Financial and Insurance Industry",
        "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
    ],
)
