from flask import Blueprint, render_template

bp = Blueprint('web', __name__)

@bp.route('/', methods=['GET'])
def index():
    return render_template('index.html', title='A* Pathfinding Visualizer')
