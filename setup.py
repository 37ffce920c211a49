# -*- coding: utf-8; -*-

import io
import os

from setuptools import setup


metadata = {}
with io.open(os.path.join('formdata', '__metadata__.py'), 'rb') as f:
    exec(f.read(), metadata)            # pylint: disable=exec-used

with io.open('README.rst') as f:
    long_description = f.read()

setup(
    name='MultipartFormData',
    version=metadata['version'],
    description='Safe multipart/form-data bodies and Content-Disposition '
                'headers',
    long_description=long_description,
    license='MIT',

    python_requires='>=3.7',
    install_requires=[],
    extras_require={
        'test': [
            'pytest >= 6.0',
        ],
    },

    packages=[
        'formdata',
        'formdata.known',
        'formdata.util',
    ],
    entry_points={
        'console_scripts': [
            'formdata=formdata.cli:main',
        ],
    },
    classifiers=[
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Programming Language :: Python :: Implementation :: PyPy',
        'Topic :: Internet :: WWW/HTTP',
    ],
    keywords='HTTP multipart form-data Content-Disposition percent-encoding',
)
