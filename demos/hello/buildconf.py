
project = {
    'name' : 'hello',
    'version-define' : 'HELLO_VERSION',
}

features = {
    'with_math' : {
        'lib' : 'm',
        'define' : 'HELLO_MATH',
    },
    'with_zlib' : {
        'lib' : 'z',
        'define' : 'HELLO_ZLIB',
        'enabled' : False,
    },
}

targets = {
    'hello' : {
        'source' : 'main.c',
        'optional' : 'with_math with_zlib',
    },
    'hello-math' : {
        'source' : 'main.c',
        'requires' : 'with_math',
        'output' : 'hello-m',
    },
}
