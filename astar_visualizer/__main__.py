import logging
import os

from . import create_app

def main():
    logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s %(name)s: %(message)s')
    app = create_app()
    port = int(os.environ.get('PORT', '8080'))
    app.run(host='0.0.0.0', port=port)

if __name__ == '__main__':
    main()
