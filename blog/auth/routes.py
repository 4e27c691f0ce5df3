"""
Auth Routes

Admin login issuing bearer tokens.
"""

from flask import request, jsonify
from flask_login import login_required, current_user

from blog.auth import auth_bp
from blog.auth.services import authenticate


@auth_bp.route('/login', methods=['POST'])
def login():
    """Exchange the admin credentials for a session token."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    token = authenticate(data.get('username'), data.get('password'))
    return jsonify({'token': token})


@auth_bp.route('/api/session')
@login_required
def session_info():
    """Report who the presented token belongs to."""
    return jsonify({'username': current_user.username})
