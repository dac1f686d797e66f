from slugstore.dao.base.identity_base_dao import IdentityBaseDAO


__all__ = ['IdentityBaseDAO']
